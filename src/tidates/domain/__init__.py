"""Pure domain layer: the date value, its enums and the clock seam."""
