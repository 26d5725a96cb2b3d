"""pygame presentation layer: draws a SessionView and its status text."""
