"""
Reference tonnages for Australian General Mass Limits (GML).

Values follow the Heavy Vehicle (Mass, Dimension and Loading) National
Regulation, Schedule 1, as applied by the NHVR, including the steer-axle
increase for vehicles with ADR 80/04 (Euro VI equivalent) engines.
All masses in kg. Used by services.gml; the figures are a lookup table, not a
formula, so a change in the regulation is a change here only.
"""

from __future__ import annotations

# --- Steer (front) axle group ---
SINGLE_STEER_KG = 6000.0
# Single steer on single tyres with section width >= WIDE_SINGLE_TYRE_MIN_MM
SINGLE_STEER_WIDE_TYRES_KG = 6700.0
# Single steer meeting the ADR 80/04 increased-limit conditions
SINGLE_STEER_ADR_80_04_KG = 7000.0
BUS_SINGLE_STEER_KG = 6500.0

TWIN_STEER_KG = 10000.0
TWIN_STEER_LOAD_SHARING_KG = 11000.0
TWIN_STEER_ADR_80_04_KG = 12000.0

# --- Non-steer (rear) axle groups ---
SINGLE_AXLE_SINGLE_TYRES_KG = 6000.0
SINGLE_AXLE_WIDE_TYRES_KG = 6700.0
SINGLE_AXLE_DUAL_TYRES_KG = 9000.0
BUS_SINGLE_AXLE_DUAL_TYRES_KG = 10000.0

TANDEM_SINGLE_TYRES_KG = 11000.0
TANDEM_WIDE_TYRES_KG = 13000.0
TANDEM_DUAL_TYRES_KG = 16500.0
# Low loader tandem with dual tyres (8 tyres per axle line)
LOW_LOADER_TANDEM_KG = 18000.0

TRI_SINGLE_TYRES_KG = 15000.0
TRI_DUAL_OR_WIDE_TYRES_KG = 20000.0
LOW_LOADER_TRI_KG = 21000.0

QUAD_AXLE_KG = 20000.0
FIVE_PLUS_AXLE_KG = 20000.0
LOW_LOADER_QUAD_PLUS_KG = 27000.0

# Section width from which a single tyre counts as "wide" (mm)
WIDE_SINGLE_TYRE_MIN_MM = 375.0

# --- ADR 80/04 increased-limit eligibility ---
ADR_STEER_TYRE_MIN_MM = 295.0
ADR_SINGLE_STEER_MIN_GVM_KG = 15000.0

# Mass transfer from steer to drive group (kg)
MASS_TRANSFER_MAX_KG = 500.0

# --- Table 1: overall ceiling by vehicle category and total axle count ---
# Not applied when the rear group is a single axle (GVM = sum of axle limits).
TABLE1_RIGID_KG = {
    3: 22500.0,
    4: 27500.0,
    5: 32000.0,
    6: 37500.0,
}
TABLE1_RIGID_MAX_KG = 42500.0

TABLE1_BUS_KG = {
    3: 22000.0,
    4: 27000.0,
}
TABLE1_BUS_MAX_KG = 27000.0

# Combination ceilings (GCM) the prime mover or rigid truck is rated within
TABLE1_PIG_TRAILER_KG = 42500.0
TABLE1_B_DOUBLE_KG = 62500.0
TABLE1_ROAD_TRAIN_KG = 79000.0

# --- Axle spacing rule ---
SHORT_SPACING_THRESHOLD_M = 2.5
SHORT_SPACING_GVM_CAP_KG = 15000.0
