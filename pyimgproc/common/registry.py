class Registry:
    mapping = {
        "encoder": {},
    }

    @classmethod
    def register_encoder(cls, fmt):
        r"""Register an encoder class for output format `fmt`

        Args:
            fmt: ImageFormat member the encoder writes.

        Usage:

            from pyimgproc.common.registry import registry

            @registry.register_encoder(ImageFormat.PNG)
            class PNGEncoder(IEncoder):
                ...
        """
        def wrap(encoder_cls):
            from pyimgproc.encoder.base import IEncoder

            assert issubclass(encoder_cls, IEncoder), (
                "All encoders must inherit 'IEncoder' class"
            )

            if fmt in cls.mapping["encoder"]:
                raise KeyError(
                    "Format '{}' already registered for {}.".format(
                        fmt, cls.mapping["encoder"][fmt]
                    )
                )
            encoder_cls.format = fmt
            cls.mapping["encoder"][fmt] = encoder_cls
            return encoder_cls

        return wrap

    # encoder
    @classmethod
    def get_encoder_class(cls, fmt):
        return cls.mapping["encoder"].get(fmt, None)

    @classmethod
    def list_encoder(cls):
        return sorted(f.value for f in cls.mapping["encoder"])


registry = Registry()
