# When true, a run whose count overshoots the end of its row fails the load
# instead of being clamped to the row.
STRICT = False
