from nighttrain.chapters.compartment import CompartmentChapter
from nighttrain.chapters.station import StationChapter

__all__ = ["CompartmentChapter", "StationChapter"]
