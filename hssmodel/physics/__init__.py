"""Physical constants, unit conversions, and thermodynamic relationships."""
