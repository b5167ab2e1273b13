import streamlit as st

from shiftboard.models.rules import RULES, STATUSES

CELL_KEY_PREFIX = "status"


def cell_container_key(status_value: str, cell_id: str) -> str:
    """Container key for one grid cell; Streamlit exposes it as class ``st-key-<key>``."""
    return f"{CELL_KEY_PREFIX}-{status_value}-{cell_id}"


def build_css() -> str:
    """Global CSS: one colour rule per status plus the grid helpers."""
    css = "<style>\n"
    for value, cfg in STATUSES.items():
        selector = f'div[class*="st-key-{CELL_KEY_PREFIX}-{value}-"] button'
        css += (
            f"{selector} {{ background-color: {cfg.color_bg} !important; "
            f"color: {cfg.color_text} !important; border-color: {cfg.color_bg} !important; font-weight: bold; }}\n"
        )
    css += f".understaffed {{ background-color: {RULES.understaffed_bg}; color: {RULES.understaffed_text}; font-weight: bold; }}\n"

    css += """
    .day-head { text-align: center; font-size: 0.75rem; padding: 2px 0; border-radius: 4px; }
    .day-count { text-align: center; font-size: 0.8rem; font-weight: bold; padding: 2px 0; border-radius: 4px; }

    /* Compact grid buttons */
    div[data-testid="stHorizontalBlock"] button { padding: 0.1rem 0.2rem; min-height: 2rem; font-size: 0.7rem; }

    /* Hide Streamlit deploy button */
    .stDeployButton { display: none !important; }

    </style>
    """
    return css


def apply_styling():
    """Apply global CSS styling based on the status table."""
    st.markdown(build_css(), unsafe_allow_html=True)
