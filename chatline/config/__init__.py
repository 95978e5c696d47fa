from chatline.config.settings import Config

__all__ = ["Config"]
