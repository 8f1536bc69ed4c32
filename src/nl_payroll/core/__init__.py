"""Payroll domain: models, rules, services and validation."""
