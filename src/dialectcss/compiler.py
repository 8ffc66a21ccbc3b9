"""Compile pipeline: decoration blocks, cached parse, layout transforms, generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from dialectcss.config import CompilerConfig
from dialectcss.decoration import DecorationEngine, Page
from dialectcss.dictionary import AliasDictionary, default_dictionary
from dialectcss.events import EventBus, StylesheetCompiled, StylesParsed
from dialectcss.generator import CanonicalOptions, generate_canonical, generate_localized
from dialectcss.model.decoration import DecorationRule
from dialectcss.model.diagnostic import Diagnostic
from dialectcss.model.rules import RuleMap
from dialectcss.parser import LocalizedParser, ParseResult, ResultCache
from dialectcss.transforms import LayoutTransform, RuleTransform, apply_transforms
from dialectcss.translate import ValueTranslator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompileResult:
    """Everything one compile produces.

    ``rules`` is the parsed map, ``expanded`` the map after layout transforms.
    ``applied`` is False when the input yielded nothing to apply and
    ``canonical`` is the previously applied output.
    """

    rules: RuleMap
    expanded: RuleMap
    localized: str
    canonical: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    decorations: tuple[DecorationRule, ...] = ()
    applied: bool = True

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]

    def to_dict(self) -> dict[str, object]:
        return {
            "canonical": self.canonical,
            "localized": self.localized,
            "rules": self.rules.to_dict(),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "decorations": [
                {"id": rule.id, "selector": rule.selector, "styles": dict(rule.styles)}
                for rule in self.decorations
            ],
            "applied": self.applied,
        }


class Compiler:
    """Compile localized text into canonical CSS plus decoration side effects."""

    def __init__(
        self,
        config: CompilerConfig | None = None,
        dictionary: AliasDictionary | None = None,
        page: Page | None = None,
        bus: EventBus | None = None,
        transforms: list[RuleTransform] | None = None,
        decorations: DecorationEngine | None = None,
    ) -> None:
        self.config = config or CompilerConfig()
        self.dictionary = dictionary or default_dictionary()
        self.translator = ValueTranslator(self.dictionary)
        self.parser = LocalizedParser(self.dictionary, self.translator)
        self.cache = ResultCache(self.config.cache_size)
        self.bus = bus or EventBus()
        self.decorations = decorations or DecorationEngine(
            page, self.dictionary, self.translator, self.bus
        )
        self.transforms: list[RuleTransform] = (
            [LayoutTransform(self.config)] if transforms is None else list(transforms)
        )
        self.options = CanonicalOptions(
            use_important=self.config.use_important,
            minify=self.config.minify,
            add_comments=self.config.add_comments,
            indent_size=self.config.indent_size,
        )
        self.last_canonical = ""

    def parse(self, text: str) -> ParseResult:
        """Parse *text* through the result cache."""
        return self.cache.get_or_parse(text, self.parser.parse)

    def render_localized(self, rules: RuleMap, decoration_sources: list[str] | None = None) -> str:
        """Localized text for *rules* with decoration blocks appended verbatim."""
        parts = [generate_localized(rules, self.dictionary, self.translator)]
        parts.extend(decoration_sources or [])
        return "\n\n".join(part for part in parts if part)

    def compile(self, text: str, options: CanonicalOptions | None = None) -> CompileResult:
        decoration = self.decorations.process(text)

        if not text.strip():
            self.last_canonical = ""
            self.bus.emit(StylesheetCompiled("", True))
            return CompileResult(RuleMap(), RuleMap(), "", "")

        cached = decoration.remainder in self.cache
        parsed = self.parse(decoration.remainder)
        diagnostics = [*parsed.diagnostics, *decoration.diagnostics]
        self.bus.emit(StylesParsed(parsed.rules.copy(), len(parsed.warnings), cached))

        localized = self.render_localized(parsed.rules, decoration.sources)

        if not parsed.rules and not decoration.rules:
            # Nothing usable: the previous output stays in effect.
            logger.info("Input produced no rules; keeping previous stylesheet")
            self.bus.emit(StylesheetCompiled(self.last_canonical, False))
            return CompileResult(
                parsed.rules, RuleMap(), localized, self.last_canonical,
                diagnostics, decoration.rules, applied=False,
            )

        expanded = apply_transforms(parsed.rules, builtin_transforms=self.transforms)
        canonical = generate_canonical(expanded, options or self.options)
        self.last_canonical = canonical
        logger.debug("Compiled %d rule(s) into %d canonical rule(s)", len(parsed.rules), len(expanded))
        self.bus.emit(StylesheetCompiled(canonical, True))
        return CompileResult(
            parsed.rules, expanded, localized, canonical, diagnostics, decoration.rules
        )
