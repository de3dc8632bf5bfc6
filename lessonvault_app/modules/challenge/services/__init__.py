from .challenge_service import ChallengeService

__all__ = ["ChallengeService"]
