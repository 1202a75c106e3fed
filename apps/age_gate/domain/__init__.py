"""Age Gate Domain Layer."""
