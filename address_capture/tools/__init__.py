"""
address-capture — tools package

  - capture_address       load a page and extract its address
  - capture_and_deliver   same, then POST the result to the webhook
"""

from .address_capture import capture_address, capture_and_deliver

__all__ = ["capture_address", "capture_and_deliver"]
