from dialectcss.transforms.base import RuleTransform
from dialectcss.transforms.layout import (
    ANCHOR_FAMILIES,
    AVATAR_FAMILY,
    INFO_FAMILY,
    AnchorFamily,
    LayoutTransform,
    find_family,
)

BUILTIN_TRANSFORMS = [
    LayoutTransform(),
]


def apply_transforms(rules, custom_transforms=None, builtin_transforms=None):
    """Apply all built-in transforms (and any custom ones) to *rules*."""
    transforms = list(BUILTIN_TRANSFORMS if builtin_transforms is None else builtin_transforms)
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        rules = t.apply(rules)
    return rules


__all__ = [
    "ANCHOR_FAMILIES",
    "AVATAR_FAMILY",
    "AnchorFamily",
    "BUILTIN_TRANSFORMS",
    "INFO_FAMILY",
    "LayoutTransform",
    "RuleTransform",
    "apply_transforms",
    "find_family",
]
