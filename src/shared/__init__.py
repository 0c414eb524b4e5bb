"""
Shared kernel: базовые строительные блоки доменной модели.

Value objects, идентификаторы, валидация полей и базовый Entity,
не зависящие от внешних систем (HTTP, хранилища и т.д.).
"""
