"""Инфраструктурные утилиты shared kernel."""
