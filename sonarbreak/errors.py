class SonarPreviewBreakError(Exception):
    """Base exception for sonarbreak."""
    pass


class LoadError(SonarPreviewBreakError):
    """Raised when the preview report cannot be located, read or parsed."""
    pass


class UnknownStatusError(SonarPreviewBreakError):
    """Raised when an analysis result carries a status outside AnalysisStatus."""
    pass
