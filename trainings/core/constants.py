"""Application constants."""

# Training rating bounds (inclusive)
RATING_MIN = 1
RATING_MAX = 5

# Trained exercise input limits
MAX_WEIGHT_KG = 1000
MAX_APPROACHES = 20
MAX_REPS = 100
