"""
bizmath — Business & stock-market math toolkit

Линейная регрессия, бизнес-модель (спрос, издержки, выручка, прибыль,
breakeven), доли владения в корпорации, аналитика временных рядов акций
и подготовка данных для графиков.
"""

__version__ = "0.1.0"
