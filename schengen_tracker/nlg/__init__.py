"""Text generation for status and trip feedback."""
