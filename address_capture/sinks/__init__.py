from .webhook import DeliveryError, build_payload, deliver_result, send_to_webhook

__all__ = ["DeliveryError", "build_payload", "deliver_result", "send_to_webhook"]
