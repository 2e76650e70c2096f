# mockstore/seeds/catalog.py
"""Fixed datasets behind the sorting endpoints (tasks, users, products, orders).

Handlers copy these lists before sorting; the module-level data is never mutated.
"""
from __future__ import annotations

from typing import Any, Dict, List

TASKS: List[Dict[str, Any]] = [
    {"id": "t001", "title": "Complete project proposal", "priority": "High", "dueDate": "2025-05-25", "status": "Pending"},
    {"id": "t002", "title": "Review code changes", "priority": "Medium", "dueDate": "2025-05-20", "status": "In Progress"},
    {"id": "t003", "title": "Update documentation", "priority": "Low", "dueDate": "2025-05-30", "status": "Pending"},
    {"id": "t004", "title": "Fix reported bug", "priority": "High", "dueDate": "2025-05-19", "status": "In Progress"},
    {"id": "t005", "title": "Implement new feature", "priority": "Medium", "dueDate": "2025-06-05", "status": "Not Started"},
    {"id": "t006", "title": "Prepare presentation", "priority": "High", "dueDate": "2025-05-28", "status": "Not Started"},
    {"id": "t007", "title": "Attend team meeting", "priority": "Medium", "dueDate": "2025-05-21", "status": "Pending"},
    {"id": "t008", "title": "Conduct testing", "priority": "Medium", "dueDate": "2025-05-26", "status": "Not Started"},
    {"id": "t009", "title": "Deploy to production", "priority": "High", "dueDate": "2025-06-10", "status": "Not Started"},
    {"id": "t010", "title": "Client follow-up", "priority": "Low", "dueDate": "2025-05-22", "status": "Pending"},
]

USERS: List[Dict[str, Any]] = [
    {"id": "001", "name": "Alice Johnson", "age": 32, "email": "alice@example.com"},
    {"id": "002", "name": "Bob Smith", "age": 45, "email": "bob@example.com"},
    {"id": "003", "name": "Charlie Brown", "age": 28, "email": "charlie@example.com"},
    {"id": "004", "name": "Diana Prince", "age": 35, "email": "diana@example.com"},
    {"id": "005", "name": "Edward Cullen", "age": 24, "email": "edward@example.com"},
    {"id": "006", "name": "Fiona Gallagher", "age": 29, "email": "fiona@example.com"},
    {"id": "007", "name": "George Lucas", "age": 50, "email": "george@example.com"},
    {"id": "008", "name": "Hannah Montana", "age": 22, "email": "hannah@example.com"},
    {"id": "009", "name": "Ian Somerhalder", "age": 38, "email": "ian@example.com"},
    {"id": "010", "name": "Julia Roberts", "age": 53, "email": "julia@example.com"},
]

PRODUCTS: List[Dict[str, Any]] = [
    {"id": "p001", "name": "Laptop", "price": 1200, "category": "Electronics"},
    {"id": "p002", "name": "Smartphone", "price": 800, "category": "Electronics"},
    {"id": "p003", "name": "Coffee Maker", "price": 150, "category": "Kitchen"},
    {"id": "p004", "name": "Desk Chair", "price": 220, "category": "Furniture"},
    {"id": "p005", "name": "Headphones", "price": 180, "category": "Electronics"},
    {"id": "p006", "name": "Monitor", "price": 350, "category": "Electronics"},
    {"id": "p007", "name": "Desk", "price": 300, "category": "Furniture"},
    {"id": "p008", "name": "Blender", "price": 120, "category": "Kitchen"},
    {"id": "p009", "name": "Keyboard", "price": 100, "category": "Electronics"},
    {"id": "p010", "name": "Bookshelf", "price": 250, "category": "Furniture"},
]

ORDERS: List[Dict[str, Any]] = [
    {"id": "o001", "customer": "Alice Johnson", "total": 1580, "date": "2025-05-15", "status": "Delivered"},
    {"id": "o002", "customer": "Bob Smith", "total": 950, "date": "2025-05-16", "status": "Processing"},
    {"id": "o003", "customer": "Charlie Brown", "total": 325, "date": "2025-05-14", "status": "Shipped"},
    {"id": "o004", "customer": "Diana Prince", "total": 780, "date": "2025-05-17", "status": "Processing"},
    {"id": "o005", "customer": "Edward Cullen", "total": 1200, "date": "2025-05-12", "status": "Delivered"},
    {"id": "o006", "customer": "Fiona Gallagher", "total": 450, "date": "2025-05-18", "status": "Pending"},
    {"id": "o007", "customer": "George Lucas", "total": 2500, "date": "2025-05-13", "status": "Shipped"},
    {"id": "o008", "customer": "Hannah Montana", "total": 320, "date": "2025-05-19", "status": "Processing"},
    {"id": "o009", "customer": "Ian Somerhalder", "total": 1100, "date": "2025-05-10", "status": "Delivered"},
    {"id": "o010", "customer": "Julia Roberts", "total": 960, "date": "2025-05-11", "status": "Delivered"},
]

# Sortable fields per dataset; anything else leaves the list in seed order
USER_SORT_FIELDS = ("name", "age")
PRODUCT_SORT_FIELDS = ("name", "price", "category")
