"""Find a Django test by name and run it."""
