"""Bounded contexts of the SCOUT resume analyzer."""
