"""
Default values for layoutmanager.

These are the values used when no stored layout matches, together with the
fixed property vocabulary captured by a save.
"""

SETTINGS_FILE_NAME = "layoutManager.json"

# Group keys as they appear in the layout file
FIGURE_GROUP = "figure"
AXIS_GROUP = "axis"
LINE_GROUP = "line"
GROUP_KEYS = (FIGURE_GROUP, AXIS_GROUP, LINE_GROUP)

NAME_KEY = "Name"

DEFAULT_LAYOUT = {
    # Figure
    "figure": {
        "Color": [1, 1, 1],
    },

    # Axes
    "axis": {
        "FontSize": 20,
        "XAxis": {"LineWidth": 2},
        "YAxis": {"LineWidth": 2},
        "ZAxis": {"LineWidth": 2},
        "XGrid": "on",
        "YGrid": "on",
        "ZGrid": "on",
        "XMinorGrid": "on",
        "YMinorGrid": "on",
        "ZMinorGrid": "on",
    },

    # Lines
    "line": {
        "LineWidth": 2,
    },
}

# Properties read from a target on save, per group and profile
FIGURE_BASIC_PROPERTIES = ["Color"]
FIGURE_FULL_PROPERTIES = ["ToolBar", "WindowState", "Position"]

AXIS_PROPERTIES = [
    "FontSize",
    "XAxis.LineWidth",
    "YAxis.LineWidth",
    "ZAxis.LineWidth",
    "XGrid",
    "YGrid",
    "ZGrid",
    "XMinorGrid",
    "YMinorGrid",
    "ZMinorGrid",
]

LINE_BASIC_PROPERTIES = ["LineWidth"]
LINE_FULL_PROPERTIES = [
    "LineStyle",
    "Marker",
    "MarkerSize",
    "MarkerFaceColor",
    "MarkerEdgeColor",
]
