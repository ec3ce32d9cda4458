"""Shared constants for the Neurological Disorders application."""

APP_TITLE = "Neurological Disorders"
PAGE_TITLE = "Neurological Disorders"

INTRO_TITLE = "When Things Go Wrong"
INTRO_TEXT = (
    "Damage to neurons, their myelin sheath, or the process of synaptic transmission "
    "can lead to a wide range of neurological disorders. Below are a few examples of "
    "how neuronal dysfunction manifests as disease."
)

DISCLAIMER_TEXT = (
    "This information is for educational purposes only and is not a substitute for "
    "professional medical advice. For detailed information, consult a healthcare "
    "provider or a trusted source."
)

# National Institute of Neurological Disorders and Stroke, a public US resource.
NINDS_URL = "https://www.ninds.nih.gov/health-information/disorders"
NINDS_LINK_TEXT = "Source: U.S. National Institute of Neurological Disorders and Stroke (NINDS)"
NINDS_LINK_HINT = "Opens the NINDS website in a browser."

KEY_CHARACTERISTIC_TITLE = "Key Characteristic"
NEURONAL_IMPACT_TITLE = "Neuronal Impact"

CARD_CORNER_RADIUS_PX = 12
HEADER_ICON_SIZE_PX = 44
ROW_ICON_WIDTH_PX = 20
BLOCK_SPACING_PX = 24
MAX_CONTENT_WIDTH_REM = 46
