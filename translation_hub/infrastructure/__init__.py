"""Infrastructure layer: storage backends and dependency wiring."""
