from link_cards.services.link_preview import LinkPreviewService

__all__ = ["LinkPreviewService"]
