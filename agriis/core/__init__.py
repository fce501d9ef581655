"""
Core Domain Layer - O Hexágono do Agriis.

Este pacote contém a lógica de negócio pura dos módulos agrícolas
(produtores, fornecedores, pedidos, combos, catálogos...), sem
dependências de frameworks.

Características:
- Zero dependências externas (Django, Celery, etc.)
- 100% testável sem banco de dados
- Agnóstico a infraestrutura
"""
