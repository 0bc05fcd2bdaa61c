"""fetchpdb tests."""
