"""Data models shared across the prompt-to-palette pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Mapping, Tuple


class Language(str, Enum):
    EN = "en"
    ES = "es"
    MIXED = "mixed"


class MatchType(str, Enum):
    EXACT = "exact"
    SYNONYM = "synonym"
    FUZZY = "fuzzy"
    STEMMED = "stemmed"
    COMPOUND = "compound"


class HarmonyType(str, Enum):
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    MONOCHROMATIC = "monochromatic"
    SPLIT_COMPLEMENTARY = "split-complementary"


class Mood(str, Enum):
    ENERGETIC = "energetic"
    CALM = "calm"
    PROFESSIONAL = "professional"
    PLAYFUL = "playful"
    ELEGANT = "elegant"
    BOLD = "bold"
    NATURAL = "natural"
    MODERN = "modern"


class Intent(str, Enum):
    BRANDING = "branding"
    WEB = "web"
    APP = "app"
    PRESENTATION = "presentation"
    CREATIVE = "creative"
    GENERAL = "general"


class SaturationPreference(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class LightnessPreference(str, Enum):
    DARK = "dark"
    MEDIUM = "medium"
    LIGHT = "light"


@dataclass(slots=True)
class HSLColor:
    """A color in HSL space; hue in degrees, saturation and lightness in percent."""

    h: float
    s: float
    l: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.h, self.s, self.l)

    def copy(self) -> HSLColor:
        return HSLColor(self.h, self.s, self.l)


@dataclass(frozen=True, slots=True)
class ColorEntry:
    """A knowledge-base mapping from a concept to a color."""

    h: float
    s: float
    l: float


@dataclass(frozen=True, slots=True)
class WeightedColor:
    """A color retained from a prompt together with its provenance."""

    h: float
    s: float
    l: float
    weight: float
    match_type: MatchType
    original_term: str
    keyword: str

    @property
    def color_key(self) -> Tuple[float, float, float]:
        return (self.h, self.s, self.l)


@dataclass(frozen=True, slots=True)
class LanguageDetection:
    primary: Language
    confidence: float
    has_spanish: bool
    has_english: bool
    is_mixed: bool


@dataclass(frozen=True, slots=True)
class PromptAnalysis:
    """Structured reading of a prompt produced by the extractor."""

    language: Language
    confidence: float
    keywords: Tuple[str, ...]
    emotions: Tuple[str, ...]
    industries: Tuple[str, ...]
    objects: Tuple[str, ...]
    colors: Tuple[WeightedColor, ...]
    intensity: float
    temperature: float
    saturation: float
    lightness: float
    harmony: HarmonyType
    mood: Mood
    context: Tuple[str, ...]
    tokens: Tuple[str, ...] = ()
    brand_personality: Tuple[str, ...] | None = None
    use_case: str | None = None
    compound_concepts: Tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class CoherenceFactors:
    """Evidence strengths; ``None`` means no evidence rather than zero."""

    temporal: float | None = None
    emotional: float | None = None
    environmental: float | None = None
    purposeful: float | None = None

    def present(self) -> Dict[str, float]:
        values = {
            "temporal": self.temporal,
            "emotional": self.emotional,
            "environmental": self.environmental,
            "purposeful": self.purposeful,
        }
        return {name: value for name, value in values.items() if value is not None}


@dataclass(frozen=True, slots=True)
class ContextualWeights:
    primary_color: WeightedColor | None
    secondary_colors: Tuple[WeightedColor, ...]
    dominant_theme: str
    intention_score: float
    coherence_factors: CoherenceFactors


@dataclass(frozen=True, slots=True)
class IntentAnalysis:
    primary_intent: Intent
    confidence: float
    suggested_harmony: HarmonyType
    requires_contrast: bool
    preferred_saturation: SaturationPreference
    preferred_lightness: LightnessPreference


@dataclass(frozen=True, slots=True)
class EmotionalProfile:
    """Emotion scalars in the unit interval plus signed biases."""

    dominant_emotion: str
    energy_level: float
    warmth: float
    sophistication: float
    playfulness: float
    saturation_bias: float
    lightness_bias: float
    recommended_harmony: HarmonyType


@dataclass(slots=True)
class ColorHarmony:
    primary: HSLColor
    secondary: HSLColor
    accent: HSLColor
    background: HSLColor
    text: HSLColor

    def as_list(self) -> List[HSLColor]:
        return [self.primary, self.secondary, self.accent, self.background, self.text]

    @classmethod
    def from_list(cls, colors: List[HSLColor]) -> ColorHarmony:
        if len(colors) != 5:
            raise ValueError("a harmony needs exactly five colors")
        return cls(*colors)


@dataclass(slots=True)
class ColorGroup:
    name: str
    base: str
    variations: Dict[int, str] = field(default_factory=dict)
    description: str = ""


@dataclass(slots=True)
class ColorMatchRecord:
    term: str
    match_type: MatchType
    weight: float


@dataclass(slots=True)
class PaletteMetadata:
    """Provenance and diagnostics attached to a generated palette."""

    created_at: datetime
    harmony: HarmonyType
    mode: str
    style: str
    language: Language
    confidence: float
    tags: List[str] = field(default_factory=list)
    wcag_aa: bool = False
    contrast_ratios: Dict[str, float] = field(default_factory=dict)
    emotional_profile: Dict[str, object] = field(default_factory=dict)
    color_matches: List[ColorMatchRecord] = field(default_factory=list)
    contextual_analysis: Dict[str, object] = field(default_factory=dict)
    seed: int = 0
    compound_concepts: List[str] | None = None
    brand_personality: List[str] | None = None
    use_case: str | None = None


@dataclass(slots=True)
class SemanticPalette:
    id: str
    name: str
    prompt: str
    description: str
    colors: Dict[str, ColorGroup]
    metadata: PaletteMetadata


@dataclass(slots=True)
class CompatibilityResult:
    score: float
    is_compatible: bool
    issues: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


@dataclass(slots=True)
class PaletteValidation:
    is_valid: bool
    overall_score: float
    issues: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


@dataclass(slots=True)
class CoherenceReport:
    """Outcome of the post-assembly semantic coherence check."""

    score: float
    issues: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    @property
    def is_coherent(self) -> bool:
        return self.score >= 0.7


@dataclass(slots=True)
class EmotionalCoherence:
    score: float
    alignments: Dict[str, float] = field(default_factory=dict)
    issues: List[str] = field(default_factory=list)


@dataclass(slots=True)
class PaletteRequest:
    prompt: str
    seed: int | None = None
    force_variation: bool = False


@dataclass(slots=True)
class GenerationReport:
    """Palette plus every intermediate record that produced it."""

    palette: SemanticPalette
    analysis: PromptAnalysis
    weights: ContextualWeights
    intent: IntentAnalysis
    profile: EmotionalProfile
    harmony: ColorHarmony
    validation: PaletteValidation
    repaired: bool
    coherence: CoherenceReport
    emotional_coherence: EmotionalCoherence
    recommendations: Mapping[str, object] = field(default_factory=dict)
