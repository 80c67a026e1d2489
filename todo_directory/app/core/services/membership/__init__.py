from .relationship_coordinator import RelationshipCoordinator

__all__ = ["RelationshipCoordinator"]
