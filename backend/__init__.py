"""Media library catalog backend."""
