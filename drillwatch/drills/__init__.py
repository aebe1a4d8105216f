"""Worked solutions to the course exercises as Python functions and classes."""