"""Domain layer - core business objects and interfaces.

This layer contains:
- Domain entities (Invoice, Item)
- Repository interfaces
- Capability interfaces (Strategy Pattern, Interface Segregation)
"""
