"""Infrastructure layer - concrete implementations of domain interfaces."""
