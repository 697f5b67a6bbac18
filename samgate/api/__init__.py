"""HTTP service for validating SAM text."""
