"""Age Gate Infrastructure Layer."""
