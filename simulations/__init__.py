# simulations/__init__.py
"""
Law-of-large-numbers report for a fair six-sided die.

Run the report via:
    python -m simulations.report --seed ... --sizes ... --spread-seeds ... --output-dir ...
"""
