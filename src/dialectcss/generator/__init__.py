from dialectcss.generator.canonical import (
    CanonicalOptions,
    categorize,
    export,
    generate_canonical,
    minify_css,
    sort_properties,
)
from dialectcss.generator.localized import export_theme, generate_localized, localized_category
from dialectcss.generator.shorthand import (
    expand_shorthand,
    merge_box,
    merge_shorthand,
    optimize,
    remove_redundant,
)

__all__ = [
    "CanonicalOptions",
    "categorize",
    "expand_shorthand",
    "export",
    "export_theme",
    "generate_canonical",
    "generate_localized",
    "localized_category",
    "merge_box",
    "merge_shorthand",
    "minify_css",
    "optimize",
    "remove_redundant",
    "sort_properties",
]
