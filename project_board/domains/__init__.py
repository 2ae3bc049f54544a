"""Domain layer (business logic and domain models).

Domain modules should not depend on UI. Collaborators such as identifier
generators are injected rather than looked up.
"""
