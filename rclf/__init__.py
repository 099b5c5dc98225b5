"""Reading, syntax checking and printing of RCLF documents."""

__version__ = "0.1.0"
__all__ = ["cli", "errors", "parser", "printer", "syntax"]