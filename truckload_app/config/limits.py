"""
Calibrated constants for the load calculator.

Suspension rates and the weight-shift blend are calibration values matched to
weighbridge readings, not derived physics. Keep them unchanged unless the
product owner signs off on a recalibration.
"""

from __future__ import annotations

# --- Geometry ---
# Cab length assumed when the chassis data gives no cab-to-axle (CA) figure (m)
NOMINAL_CAB_LENGTH_M = 2.0

# Minimum gap between two items on the floor (m)
MIN_ITEM_SPACING_M = 0.01

# Items closer than this are treated as touching, not overlapping (m)
TOUCH_TOLERANCE_M = 1e-6

# Step used when scanning for a free floor position (m)
FREE_POSITION_GRID_STEP_M = 0.1

# --- Suspension compression (metres per 100 kg of axle load) ---
TAPER_LEAF_RATE_M_PER_100KG = 0.0005  # 0.5 mm / 100 kg
TAPER_LEAF_MAX_TRAVEL_M = 0.020

MULTI_LEAF_RATE_M_PER_100KG = 0.0001  # 0.1 mm / 100 kg
MULTI_LEAF_MAX_TRAVEL_M = 0.010

AIRBAG_BASE_RATE_M_PER_100KG = 0.0008  # 0.8 mm / 100 kg
AIRBAG_STIFFENING_PER_2000KG = 0.1  # rate grows 10 % per 2000 kg
AIRBAG_MAX_TRAVEL_M = 0.150

# --- Weight distribution solver ---
SOLVER_MAX_ITERATIONS = 5
SOLVER_CONVERGENCE_KG = 0.1

# Estimated load COG height = BASE + factor * SPAN, factor clamped to [MIN, MAX]
COG_HEIGHT_BASE_M = 1.0
COG_HEIGHT_SPAN_M = 0.5
COG_HEIGHT_FACTOR_MIN = 0.3
COG_HEIGHT_FACTOR_MAX = 0.7

# Weight-shift blend: compression ratio vs COG-shift ratio
COMPRESSION_SHIFT_WEIGHT = 0.7
COG_SHIFT_WEIGHT = 0.3
# Fraction of the carried load the blended ratio is applied to
SHIFT_LOAD_FRACTION = 0.5

# --- Compliance bands (% of limit) ---
COMPLIANCE_WARNING_PCT = 90.0
COMPLIANCE_OVER_PCT = 100.0

# Allowed mismatch between declared tare and front + rear tare (fraction)
TARE_SUM_TOLERANCE = 0.01

# --- Autofill penalty defaults ---
PENALTY_FRONT_OVERAGE = 1000.0
PENALTY_REAR_OVERAGE = 1000.0
PENALTY_GVM_OVERAGE = 500.0
PENALTY_BALANCE = 1.0
PENALTY_FRONT_RELIEF_THRESHOLD_PCT = 85.0
PENALTY_FRONT_RELIEF = 10.0
PENALTY_FORWARD_BIAS = 50.0
PENALTY_NON_PREFERRED_SIDE = 30.0
PENALTY_CENTER_SIDE = 10.0
PENALTY_ASYMMETRY = 40.0
ASYMMETRY_TOLERANCE = 1

# Floating-point tolerance
EPS = 1e-9
