# Domain layer - entities, value objects, validators and exceptions
