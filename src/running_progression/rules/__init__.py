"""Progression rules, auto-discovered by the RuleRegistry."""
