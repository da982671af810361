"""Web Push adapter – pywebpush-backed PushTransport."""
from roamease_realtime.adapters.webpush.transport import WebPushTransport

__all__ = ["WebPushTransport"]
