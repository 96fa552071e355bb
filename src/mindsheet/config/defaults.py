"""
mindsheet.config.defaults - Default configuration values
"""

DEFAULT_CONFIG = {
    "main_topics": ["Main Topic 1", "Main Topic 2", "Main Topic 3", "Main Topic 4"],
    "sheet": {
        "background_color": "white",
    },
    "root_topic": {
        "name": "Central Topic",
    },
    "topic": {
        # Appended to the text of a duplicated topic (older releases used " - Copy")
        "duplicate_suffix": "",
        "duplicate_copies_style": False,
        "default_shape": {
            "fill_color": "white",
            "border": "black",
            "length": 100,
        },
        "default_text": {
            "font_size": 12,
            "font_family": "Arial",
            "font_style": "normal",
            "text_color": "black",
        },
        "default_position": {
            "x": 0,
            "y": 0,
        },
    },
    "relationship": {
        "name": "relationship",
    },
}

CONFIG_FILE_NAME = ".mindsheet.toml"
ENV_PREFIX = "MINDSHEET_"
