"""
Category — пример сущности на базе shared kernel.
"""
