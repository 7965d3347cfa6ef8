# No dependencies

HUE_360 = 360
BYTE_MAX = 255

# Hue is reported to centi-degree precision, e.g. 74.52
HUE_DECIMALS = 2
