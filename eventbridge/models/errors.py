class RegionMissingError(Exception):
    def __init__(
        self,
        message="Region required. Pass `region=` or set AWS_REGION.",
    ):
        self.message = message
        super().__init__(self.message)
