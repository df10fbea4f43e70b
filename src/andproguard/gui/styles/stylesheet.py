"""
Centralized stylesheet for the AndProguard settings window.
Defines colors, fonts, and QSS styles as reusable constants.
"""

# Color Palette
COLORS = {
    "bg_dark": "#1e1e1e",        # Input fields
    "bg_medium": "#2d2d2d",      # Window and form frame
    "bg_light": "#3d3d3d",       # Disabled elements
    "bg_lighter": "#444444",     # Secondary buttons
    "text_primary": "#ffffff",   # Main text content
    "text_secondary": "#aaaaaa", # Hints, field descriptions
    "text_disabled": "#888888",  # Disabled button text
    "border_default": "#555555", # Default borders
    "primary": "#4a9eff",        # Primary buttons, focused inputs
    "primary_hover": "#3a8eef",  # Primary button hover
    "primary_pressed": "#2a7edf",# Primary button pressed
}

# Typography
FONTS = {
    "family": '-apple-system, BlinkMacSystemFont, "Segoe UI", "Roboto", "Helvetica Neue", Arial, sans-serif',
    "mono": '"JetBrains Mono", "Consolas", "DejaVu Sans Mono", monospace',
    "size_title": "16px",
    "size_body": "13px",
    "size_small": "11px",
    "weight_bold": "bold",
}

# Spacing and Layout
SPACING = {
    "radius_sm": "4px",
    "radius_lg": "8px",
    "min_height_button": "32px",
    "min_height_input": "28px",
}

# Component Styles
STYLES = {
    "primary_button": f"""
        QPushButton {{
            background-color: {COLORS['primary']};
            color: white;
            border: none;
            padding: 6px 16px;
            border-radius: {SPACING['radius_sm']};
            font-weight: {FONTS['weight_bold']};
            font-size: {FONTS['size_body']};
            min-height: {SPACING['min_height_button']};
        }}
        QPushButton:hover {{
            background-color: {COLORS['primary_hover']};
        }}
        QPushButton:pressed {{
            background-color: {COLORS['primary_pressed']};
        }}
        QPushButton:disabled {{
            background-color: {COLORS['bg_light']};
            color: {COLORS['text_disabled']};
        }}
    """,
    "secondary_button": f"""
        QPushButton {{
            background-color: {COLORS['bg_lighter']};
            color: white;
            border: none;
            padding: 6px 16px;
            border-radius: {SPACING['radius_sm']};
            font-size: {FONTS['size_body']};
            min-height: {SPACING['min_height_button']};
        }}
        QPushButton:hover {{
            background-color: {COLORS['border_default']};
        }}
    """,
    "rule_field": f"""
        QLineEdit {{
            background-color: {COLORS['bg_dark']};
            color: white;
            border: 1px solid {COLORS['border_default']};
            border-radius: {SPACING['radius_sm']};
            padding: 2px 8px;
            font-family: {FONTS['mono']};
            font-size: {FONTS['size_body']};
            min-height: {SPACING['min_height_input']};
        }}
        QLineEdit:focus {{
            border: 1px solid {COLORS['primary']};
        }}
    """,
    "checkbox": f"""
        QCheckBox {{
            color: white;
            spacing: 8px;
            font-size: {FONTS['size_body']};
        }}
        QCheckBox::indicator {{
            width: 16px;
            height: 16px;
        }}
    """,
    "form_frame": f"""
        QFrame {{
            background-color: {COLORS['bg_medium']};
            border: 1px solid {COLORS['border_default']};
            border-radius: {SPACING['radius_lg']};
        }}
    """,
    "field_label": f"""
        QLabel {{
            color: {COLORS['text_secondary']};
            font-size: {FONTS['size_body']};
            border: none;
        }}
    """,
    "hint_label": f"""
        QLabel {{
            color: {COLORS['text_secondary']};
            font-size: {FONTS['size_small']};
            border: none;
        }}
    """,
    "title_label": f"""
        QLabel {{
            font-size: {FONTS['size_title']};
            font-weight: {FONTS['weight_bold']};
            color: white;
        }}
    """,
}


def get_application_stylesheet() -> str:
    """Returns the complete QSS for the entire application."""
    return f"""
        QMainWindow, QDialog {{
            background-color: {COLORS['bg_medium']};
            color: {COLORS['text_primary']};
            font-family: {FONTS['family']};
        }}
        QWidget {{
            color: {COLORS['text_primary']};
            font-family: {FONTS['family']};
        }}
        QLabel {{
            color: {COLORS['text_primary']};
        }}
    """


def get_widget_style(widget_type: str) -> str:
    """Returns QSS for specific widget type."""
    return STYLES.get(widget_type, "")
