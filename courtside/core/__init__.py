"""
Core league logic.

Subpackages:
- league: conferences, divisions and the default 30-team league
- schedule: regular season / preseason generation and validation
- contracts: salary cap model and contract shapes
- freeagency: free agent preferences, offer scoring and acceptance
- trading: trade asset valuation, validation and evaluation
- ai: CPU team strategy and decision making
"""
