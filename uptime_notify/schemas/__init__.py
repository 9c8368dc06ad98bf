from uptime_notify.schemas.notification import (
    AuthenticationMethod,
    NotificationTestRequest,
    XMattersConfig,
)

__all__ = ["AuthenticationMethod", "NotificationTestRequest", "XMattersConfig"]
