from models.access_token import AccessToken
from models.form import Form
from models.response import FormResponse, SummaryStatus

__all__ = [
    "AccessToken",
    "Form",
    "FormResponse",
    "SummaryStatus",
]
