# Newtonian gravitational constant, m³ kg⁻¹ s⁻²
GRAVITATIONAL_CONSTANT = 6.674e-11
