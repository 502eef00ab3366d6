"""
Curation configuration — scoring weights, adaptation multipliers, diversity caps.

CurationConfig defaults are defined here. The server may pass a dict
(e.g. from a JSON file named by CURATION_CONFIG_PATH); from_dict() merges it with these defaults.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class CurationConfig(BaseModel):
    """Configuration for the content curation pipeline."""

    # -------------------------------------------------------------------------
    # Quality Scorer weights (must sum to 1.0)
    # quality = Σ weight_i * sub_score_i, each sub-score clamped to [0, 100]
    # -------------------------------------------------------------------------

    quality_weight_relevance: float = 0.25
    quality_weight_credibility: float = 0.20
    quality_weight_freshness: float = 0.15
    quality_weight_completeness: float = 0.15
    quality_weight_engagement: float = 0.10
    quality_weight_difficulty: float = 0.10
    quality_weight_accessibility: float = 0.05

    # -------------------------------------------------------------------------
    # Combined score weights (must sum to 1.0)
    # combined = weight_quality * quality + weight_personalization * personalization
    #            + weight_path_alignment * path_alignment
    # -------------------------------------------------------------------------

    weight_quality: float = 0.40
    weight_personalization: float = 0.35
    weight_path_alignment: float = 0.25

    # -------------------------------------------------------------------------
    # Adaptation multipliers (applied difficulty first, then format)
    # -------------------------------------------------------------------------

    # Advanced content when the directive says decrease.
    decrease_advanced_multiplier: float = 0.8
    # Beginner content when the directive says increase.
    increase_beginner_multiplier: float = 0.9
    # Format in the boost list.
    boost_format_multiplier: float = 1.1
    # Format in the penalty list.
    penalty_format_multiplier: float = 0.9
    # Formats that historically hold attention least; always penalized.
    low_engagement_formats: List[str] = Field(
        default_factory=lambda: ["article", "documentation"]
    )

    # -------------------------------------------------------------------------
    # Diversity Selector caps
    # -------------------------------------------------------------------------

    max_per_format: int = 3
    max_per_platform: int = 2

    # -------------------------------------------------------------------------
    # Candidate pool
    # -------------------------------------------------------------------------

    # Items with quality below this are dropped before ranking. 0 disables the floor.
    quality_floor: int = 0
    # Source labels in merge order; the first-seen copy of a URL wins on dedup.
    source_priority: List[str] = Field(
        default_factory=lambda: ["search", "video", "books", "learning_platforms", "generated"]
    )

    # -------------------------------------------------------------------------
    # Insight quality bands
    # -------------------------------------------------------------------------

    excellent_threshold: int = 85
    good_threshold: int = 70
    fair_threshold: int = 40

    # -------------------------------------------------------------------------
    # Curation cache
    # -------------------------------------------------------------------------

    cache_ttl_seconds: int = 30 * 60
    cache_max_entries: int = 100

    @model_validator(mode="after")
    def weights_sum_to_one(self):
        quality_total = (
            self.quality_weight_relevance
            + self.quality_weight_credibility
            + self.quality_weight_freshness
            + self.quality_weight_completeness
            + self.quality_weight_engagement
            + self.quality_weight_difficulty
            + self.quality_weight_accessibility
        )
        if abs(quality_total - 1.0) > 0.01:
            raise ValueError(f"Quality weights must sum to 1.0, got {quality_total}")
        combined_total = (
            self.weight_quality + self.weight_personalization + self.weight_path_alignment
        )
        if abs(combined_total - 1.0) > 0.01:
            raise ValueError(f"Combined weights must sum to 1.0, got {combined_total}")
        return self

    @property
    def quality_weights(self) -> Dict[str, float]:
        """Quality weights keyed by sub-score name (breakdown order)."""
        return {
            "relevance": self.quality_weight_relevance,
            "credibility": self.quality_weight_credibility,
            "freshness": self.quality_weight_freshness,
            "completeness": self.quality_weight_completeness,
            "engagement": self.quality_weight_engagement,
            "difficulty": self.quality_weight_difficulty,
            "accessibility": self.quality_weight_accessibility,
        }

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "CurationConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "quality_weights" in config_dict:
            for name, value in config_dict["quality_weights"].items():
                flat[f"quality_weight_{name}"] = value
        if "combined_weights" in config_dict:
            for name, value in config_dict["combined_weights"].items():
                flat[f"weight_{name}"] = value
        if "adaptation" in config_dict:
            flat.update(config_dict["adaptation"])
        if "diversity" in config_dict:
            dv = config_dict["diversity"]
            if "max_per_format" in dv:
                flat["max_per_format"] = dv["max_per_format"]
            if "max_per_platform" in dv:
                flat["max_per_platform"] = dv["max_per_platform"]
        if "candidates" in config_dict:
            flat.update(config_dict["candidates"])
        if "insights" in config_dict:
            ins = config_dict["insights"]
            for band in ("excellent", "good", "fair"):
                if band in ins:
                    flat[f"{band}_threshold"] = ins[band]
        if "cache" in config_dict:
            ca = config_dict["cache"]
            if "ttl_seconds" in ca:
                flat["cache_ttl_seconds"] = ca["ttl_seconds"]
            if "max_entries" in ca:
                flat["cache_max_entries"] = ca["max_entries"]
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = CurationConfig()


def resolve_config(config: Optional["CurationConfig"]) -> "CurationConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
