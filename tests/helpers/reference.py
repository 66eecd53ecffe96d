"""
Reference cam values shared by the test modules.

The reference cam (pitch 0.08, pin 0.15, eccentricity 0.05, 10 teeth,
50° limit) is the default of the SketchUp hypocycloid cam plug-in. Its pressure angle
bounds, 13° and 112°, are regression values.
"""

REF_P = 0.08
REF_D = 0.15
REF_E = 0.05
REF_N = 10
REF_S = 1000
REF_ANG = 50.0

REF_PA_MIN_DEG = 13.0
REF_PA_MAX_DEG = 112.0
REF_PA_RAD_MIN = 0.6849
REF_PA_RAD_MAX = 0.7522

# Radius of the uncorrected profile at roll angle 0: p*n + e - d/2
REF_TIP_RADIUS = 0.775
