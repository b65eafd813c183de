"""BarberAgenda - appointment booking API for a single-location barbershop"""

__version__ = "1.1.0"
