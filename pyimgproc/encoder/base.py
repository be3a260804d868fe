from abc import ABC, abstractmethod
from typing import BinaryIO

from PIL import Image


class IEncoder(ABC):
    # Set by registry.register_encoder
    format = None

    @abstractmethod
    def process(self, image: Image.Image, sink: BinaryIO, quality: int):
        pass

    def __call__(self, image: Image.Image, sink: BinaryIO, quality: int = 90):
        return self.process(image, sink, quality)
