"""HTTP service exposing silence analysis and removal."""
