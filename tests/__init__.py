"""Test suite for the engineering unit conversion library."""
