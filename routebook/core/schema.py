"""JSON schema definitions for world tables and build data.

Defines the strict structure external data files must follow before they are
turned into dataclasses by the loader.
"""

_ID_LIST = {"type": "array", "items": {"type": "string", "minLength": 1}}

# gem id -> list of classes (empty list = every class)
_GEM_OFFER = {
    "type": "object",
    "additionalProperties": {"type": "array", "items": {"type": "string"}},
}

AREAS_SCHEMA = {
    "type": "object",
    "additionalProperties": {
        "type": "object",
        "required": ["id", "act", "name"],
        "properties": {
            "id": {"type": "string", "minLength": 1},
            "act": {"type": "integer", "minimum": 1},
            "name": {"type": "string"},
            "connection_ids": _ID_LIST,
            "is_town_area": {"type": "boolean", "default": False},
            "has_waypoint": {"type": "boolean", "default": False},
            "crafting_recipes": {"type": "array", "items": {"type": "string"}},
        },
        "additionalProperties": False,
    },
}

KILL_WAYPOINTS_SCHEMA = {
    "type": "object",
    "additionalProperties": _ID_LIST,
}

QUESTS_SCHEMA = {
    "type": "object",
    "additionalProperties": {
        "type": "object",
        "required": ["id", "name", "act"],
        "properties": {
            "id": {"type": "string", "minLength": 1},
            "name": {"type": "string"},
            "act": {"type": "integer", "minimum": 1},
            "reward_offers": {
                "type": "array",
                "items": {
                    "type": "object",
                    "required": ["quest_npc"],
                    "properties": {
                        "quest_npc": {"type": "string"},
                        "quest": _GEM_OFFER,
                        "vendor": _GEM_OFFER,
                    },
                    "additionalProperties": False,
                },
            },
        },
        "additionalProperties": False,
    },
}

BUILD_DATA_SCHEMA = {
    "type": "object",
    "required": ["characterClass"],
    "properties": {
        "characterClass": {"type": "string", "minLength": 1},
        "requiredGems": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id"],
                "properties": {
                    "id": {"type": "string", "minLength": 1},
                    "note": {"type": "string"},
                },
                "additionalProperties": False,
            },
        },
    },
    "additionalProperties": False,
}
