"""Terminal status lines, rust-project.json generation and worked solutions to Rust course exercises."""

__version__ = "5.1.1"