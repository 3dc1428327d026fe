from .fields import (
    EXTERIOR,
    INTERIOR,
    FieldModel,
    InverseSquareField,
    LinearInteriorField,
    PiecewiseField,
)
from .analytic import reference_fall_time, surface_speed
