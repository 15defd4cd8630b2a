"""Integer-only algorithms behind FixMath.

- basic: rounding, sign and ordering
- sqrt: Heron's integer square root
- trig: table-interpolated sine/cosine/tangent
- cordic: atan2 and the inverse functions built on it
- logexp: binary logarithm, powers and exponential
"""
