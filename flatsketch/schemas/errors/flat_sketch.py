""" Errors for FlatSketchGenerator """


class FlatSketchError(RuntimeError):
    """ Base error for the flat sketch pipeline """


class InvalidRequestError(FlatSketchError, ValueError):
    """ Neither prompt nor imageUrl is present """


class MissingCredentialError(FlatSketchError):
    """ Upstream credential is not configured """

    def __init__(self, credential: str) -> None:
        self.credential = credential
        super().__init__(f"{credential} not configured")


class UpstreamEnhancementError(FlatSketchError):
    """ Reasoning model failed while enhancing the prompt """


class UpstreamImageGenerationError(FlatSketchError):
    """ Image model failed on one of the variant calls """


class UpstreamDetailGenerationError(FlatSketchError):
    """ Reasoning model failed while generating construction details """


class UpstreamClientError(FlatSketchError):
    """ Upstream HTTP API returned an error or an unusable payload """
