from abc import ABC, abstractmethod


class BaseChatClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        user_prompt: str,
    ) -> str:
        """Send a single user-role prompt and return the reply text.

        Raises:
            ModelInvocationError: on transport failure, timeout or an empty reply.
        """
