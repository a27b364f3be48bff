class AcknowledgementException(Exception):
    pass


class MissingReasonEmbed(AcknowledgementException):
    def __init__(self):
        super().__init__("Acknowledgement has no embed to store a reason in")


class ReasonTooLong(AcknowledgementException):
    def __init__(self):
        super().__init__("Reason doesn't fit in the acknowledgement description")
