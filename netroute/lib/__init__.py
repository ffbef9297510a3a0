"""Graph model and routing algorithms for netroute."""
