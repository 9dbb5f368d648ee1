"""
Papalote Market - Backend API
Marketplace que conecta artesanos mexicanos con compradores
"""
__version__ = "1.0.0"
