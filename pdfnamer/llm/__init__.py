from pdfnamer.llm.client_base import BaseChatClient
from pdfnamer.llm.exceptions import ModelInvocationError
from pdfnamer.llm.factory import ChatClientFactory

__all__ = ["BaseChatClient", "ChatClientFactory", "ModelInvocationError"]
