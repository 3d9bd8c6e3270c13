from exec_timer.services.order_service import OrderService

__all__ = ["OrderService"]
