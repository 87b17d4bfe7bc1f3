"""
Core constrained arithmetic.

numera.core.math — примитивы над raw int (предикаты, checked-арифметика,
матрица операторов, сокращение дробей).
numera.core.domain — валидированные неизменяемые типы значений.
"""
