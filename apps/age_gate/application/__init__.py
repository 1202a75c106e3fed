"""Age Gate Application Layer."""
