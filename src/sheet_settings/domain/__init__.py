"""Domain layer — models, rules, ports and errors."""
