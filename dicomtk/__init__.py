"""Building blocks for DICOM: person names, VR codes, image frames and binary I/O."""

__version__ = "0.1.0"
__all__ = ["dicomio", "frame", "personname", "pn_group", "vrraw"]