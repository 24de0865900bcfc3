"""Test suite for the Bookstore API."""
