"""Rate Service: получение курсов валют из внешнего API.

Состоит из:
- config: конфигурация API (URL, ключ, базовая валюта, таймаут)
- api_clients: работа с внешним API
- loader: однократная загрузка курсов при старте с логированием
"""
