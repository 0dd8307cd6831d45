"""Central color palette for the tour host UI."""

BG_SCREEN        = (16, 18, 28)      # page background
BG_NAV           = (24, 26, 40)      # top navigation bar
BG_WIDGET        = (38, 42, 60)      # placeholder widgets
BG_TOOLTIP       = (20, 20, 35, 235) # tour tooltip panel (with alpha)
BG_BUBBLE        = (30, 34, 58)      # assistant bubble

BORDER_WIDGET    = (70, 76, 104)     # widget outlines
BORDER_TOOLTIP   = (200, 180, 100)   # tour tooltip border
BORDER_BUBBLE    = (110, 130, 220)   # assistant bubble border

TEXT_NORMAL      = (180, 180, 200)   # default label text
TEXT_BRIGHT      = (220, 220, 240)   # primary readable text
TEXT_TITLE       = (220, 190, 110)   # tooltip titles
TEXT_DIM         = (120, 120, 140)   # hints and progress text

SPOTLIGHT_GLOW   = (200, 180, 100)   # pulsing outline around the target
OVERLAY_DIM      = (0, 0, 0, 128)    # screen dimming outside the spotlight
BEACON           = (240, 90, 90)     # pulsing beacon dot

BTN_PRIMARY      = (60, 130, 60)     # Next
BTN_FINISH       = (130, 60, 60)     # Last
BTN_SECONDARY    = (60, 60, 100)     # Back
BTN_MUTED        = (60, 60, 65)      # Skip / Close
BTN_TEXT         = (230, 230, 230)

TITLE_TEXT       = (200, 180, 140)   # page titles
