"""Test suite for the Paradex auth client."""
