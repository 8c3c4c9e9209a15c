"""
Field merge rules.
Each rule folds a partner field into its primary field so the pair reads as one
phrase. Partners are never emitted on their own.
"""

from typing import Any, Callable, Dict, FrozenSet, Mapping, NamedTuple

from cineprompt.features.prompts.prompt_text import as_text, ensure_quoted
from cineprompt.features.prompts.sections import CUSTOM_LOCATION_FIELD


__all__ = ["MergeRule", "MERGE_RULES", "MERGE_SKIP_FIELDS", "apply_merge_rule"]


Combiner = Callable[[str, str, Mapping[str, Any]], str]


class MergeRule(NamedTuple):
    partner: str
    combine: Combiner


CAMERA_BRANDS = ("ARRI", "Sony", "RED", "Canon", "Panasonic", "Blackmagic")


def _comma_pair(primary: str, partner: str, fields: Mapping[str, Any]) -> str:
    if primary and partner:
        return f"{primary}, {partner}"
    return primary or partner


def _shot_with_movement(shot: str, movement: str, fields: Mapping[str, Any]) -> str:
    if shot and movement:
        if movement == "static":
            return f"{shot}, locked-off static camera"
        return f"{shot} with {movement} camera movement"
    if movement:
        return "locked-off static camera" if movement == "static" else f"{movement} camera movement"
    return shot


def _setting_with_location(setting: str, location_type: str, fields: Mapping[str, Any]) -> str:
    custom = as_text(fields.get(CUSTOM_LOCATION_FIELD))
    if location_type and custom:
        location = f"{location_type}, {custom}"
    else:
        location = location_type or custom or ""
    if setting and location:
        return f"{setting}, {location}"
    return setting or location


def _focal_length_with_lens(focal_length: str, brand: str, fields: Mapping[str, Any]) -> str:
    if focal_length and brand:
        return f"{focal_length.removesuffix(' lens')} {brand}"
    return focal_length or brand


def _lighting_style_with_type(style: str, lighting_type: str, fields: Mapping[str, Any]) -> str:
    if style and lighting_type:
        stripped = style.removesuffix(" light").removesuffix(" lighting")
        return f"{stripped} {lighting_type}"
    return style or lighting_type


def _profile_name(camera_body: str, color_science: str) -> str:
    profile = color_science.split(" flat log")[0].split(" flat ")[0]
    for brand in CAMERA_BRANDS:
        if brand in camera_body and profile.startswith(brand + " "):
            return profile[len(brand) + 1:]
    return profile


def _camera_with_color_science(camera_body: str, color_science: str, fields: Mapping[str, Any]) -> str:
    if camera_body and color_science:
        profile = _profile_name(camera_body, color_science)
        return f"{camera_body} in {profile}, flat log footage, ungraded"
    return camera_body or color_science


def _hair_style_with_color(style: str, color: str, fields: Mapping[str, Any]) -> str:
    if style and color:
        return f"{style.removesuffix(' hair')} {color.removesuffix(' hair')} hair"
    return style or color


def _label_with_age(label: str, age: str, fields: Mapping[str, Any]) -> str:
    if label and age:
        # Literal prefix match; "In Their 30s" takes the comma form.
        if age.startswith("in their"):
            return f"{label} {age}"
        return f"{label}, {age}"
    return label or age


def _music_genre_with_mood(genre: str, mood: str, fields: Mapping[str, Any]) -> str:
    if genre and mood:
        return f"{mood.split(',')[0].strip()} {genre}"
    return genre or mood


def _sound_mode_with_voiceover(mode: str, voiceover: str, fields: Mapping[str, Any]) -> str:
    if mode and voiceover:
        return f"{mode}: {ensure_quoted(voiceover.strip())}"
    return mode or voiceover


# Primary field -> rule
MERGE_RULES: Dict[str, MergeRule] = {
    "shot_type": MergeRule("movement", _shot_with_movement),
    "setting": MergeRule("location_type", _setting_with_location),
    "focal_length": MergeRule("lens_brand", _focal_length_with_lens),
    "lighting_style": MergeRule("lighting_type", _lighting_style_with_type),
    "env_time": MergeRule("weather", _comma_pair),
    "key_light": MergeRule("fill_light", _comma_pair),
    "camera_body": MergeRule("color_science", _camera_with_color_science),
    "film_stock": MergeRule("color_grade", _comma_pair),
    "hair_style": MergeRule("hair_color", _hair_style_with_color),
    "expression": MergeRule("body_language", _comma_pair),
    "char_label": MergeRule("age_range", _label_with_age),
    "creature_category": MergeRule("creature_label", _comma_pair),
    "music_genre": MergeRule("music_mood", _music_genre_with_mood),
    "sound_mode": MergeRule("voiceover_text", _sound_mode_with_voiceover),
}

# Fields only ever rendered through a merge rule
MERGE_SKIP_FIELDS: FrozenSet[str] = frozenset(
    [rule.partner for rule in MERGE_RULES.values()] + [CUSTOM_LOCATION_FIELD]
)


def apply_merge_rule(primary_field: str, fields: Mapping[str, Any]) -> str:
    """
    Render a primary field together with its partner.

    Returns "" when neither side has a value.
    """
    rule = MERGE_RULES[primary_field]
    primary = as_text(fields.get(primary_field))
    partner = as_text(fields.get(rule.partner))
    if not primary and not partner:
        return ""
    return rule.combine(primary, partner, fields) or ""
