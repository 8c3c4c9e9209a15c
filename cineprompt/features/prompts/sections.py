"""
Section ordering for prompt assembly.
Output order follows SECTION_ORDER exactly; consumers of generated text rely on it.
"""

from typing import Dict, FrozenSet, Iterator, List, Tuple

# "dialogue" sits in SOUND after voiceover_text so a dialogue line renders
# as `Dialogue: "..."`; without the entry the field would never be emitted.
SECTION_ORDER: List[Tuple[str, List[str]]] = [
    ("STYLE", [
        "media_type", "commercial_type", "documentary_style", "animation_style",
        "music_video_style", "social_media_style", "genre", "tone", "format",
    ]),
    ("SUBJECT", [
        "char_label", "age_range", "build", "hair_style", "hair_color",
        "subject_description", "wardrobe", "expression", "body_language", "framing",
        "creature_category", "creature_label", "creature_size", "creature_body",
        "creature_skin", "creature_description", "creature_expression", "creature_framing",
        "obj_description", "obj_material", "obj_condition", "obj_scale",
        "prod_description", "prod_material", "prod_staging", "prod_condition",
        "food_description", "food_state", "food_presentation", "food_texture",
        "cloth_description", "cloth_fabric", "cloth_presentation", "cloth_fit",
        "art_description", "art_medium", "art_setting", "art_condition",
        "botan_description", "botan_type", "botan_stage", "botan_detail",
        "veh_type", "veh_description", "veh_era", "veh_condition",
        "land_season", "land_scale",
        "abs_description", "abs_quality", "abs_movement",
    ]),
    ("ACTIONS", [
        "movement_type", "pacing", "interaction_type", "action_primary",
        "beat_1", "beat_2", "beat_3",
    ]),
    ("ENVIRONMENT", [
        "setting", "isolation", "location_type", "abstract_environment",
        "custom_location", "location", "env_time", "weather", "props",
        "env_fg", "env_mg", "env_bg",
    ]),
    ("CINEMATOGRAPHY", [
        "shot_type", "movement", "camera_body", "focal_length", "lens_brand",
        "lens_filter", "dof", "lighting_style", "lighting_type", "key_light", "fill_light",
    ]),
    ("PALETTE", [
        "color_science", "film_stock", "color_grade", "palette_colors", "skin_tones",
    ]),
    ("SOUND", [
        "sound_mode", "voiceover_text", "dialogue",
        "sfx_environment", "sfx_interior", "sfx_mechanical", "sfx_dramatic",
        "ambient", "music_genre", "music_mood", "music",
    ]),
]

SUBJECT_SECTION = "SUBJECT"
CINEMATOGRAPHY_SECTION = "CINEMATOGRAPHY"

# Media type -> field holding its subcategory
MEDIA_SUBCATEGORY_FIELDS: Dict[str, str] = {
    "commercial": "commercial_type",
    "cinematic": "genre",
    "documentary": "documentary_style",
    "animation": "animation_style",
    "music video": "music_video_style",
    "social media": "social_media_style",
}

MEDIA_TYPE_FIELD = "media_type"
MEDIA_ABSORBED_FIELDS: FrozenSet[str] = frozenset(
    [MEDIA_TYPE_FIELD, *MEDIA_SUBCATEGORY_FIELDS.values()]
)

# Camera gear shares one sentence
GEAR_FIELDS: FrozenSet[str] = frozenset(["camera_body", "focal_length", "lens_filter"])

FRAMING_FIELD = "framing"
DIALOGUE_FIELD = "dialogue"
CUSTOM_LOCATION_FIELD = "custom_location"


def iter_schema_fields() -> Iterator[Tuple[str, str]]:
    """Yield (section, field) pairs in output order."""
    for section, fields in SECTION_ORDER:
        for field in fields:
            yield section, field
