from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class SentenceID(str, Enum):
    """Type tags of the sentences the parser knows about."""

    # standard
    AAM = 'AAM'
    ALR = 'ALR'
    APB = 'APB'
    BOD = 'BOD'
    BWC = 'BWC'
    BWR = 'BWR'
    DBK = 'DBK'
    DBT = 'DBT'
    DPT = 'DPT'
    DSC = 'DSC'
    DTM = 'DTM'
    GBS = 'GBS'
    GGA = 'GGA'
    GLL = 'GLL'
    GNS = 'GNS'
    GRS = 'GRS'
    GSA = 'GSA'
    GST = 'GST'
    GSV = 'GSV'
    HDG = 'HDG'
    HDM = 'HDM'
    HDT = 'HDT'
    MTW = 'MTW'
    MWD = 'MWD'
    MWV = 'MWV'
    RMB = 'RMB'
    RMC = 'RMC'
    ROT = 'ROT'
    RPM = 'RPM'
    RSA = 'RSA'
    RTE = 'RTE'
    TXT = 'TXT'
    VBW = 'VBW'
    VHW = 'VHW'
    VLW = 'VLW'
    VPW = 'VPW'
    VTG = 'VTG'
    VWR = 'VWR'
    WCV = 'WCV'
    WPL = 'WPL'
    XDR = 'XDR'
    XTE = 'XTE'
    ZDA = 'ZDA'

    # AIS
    ABK = 'ABK'
    ABM = 'ABM'
    BBM = 'BBM'
    VDM = 'VDM'
    VDO = 'VDO'

    # proprietary (Garmin)
    PGRME = 'PGRME'
    PGRMM = 'PGRMM'
    PGRMZ = 'PGRMZ'

    @property
    def display_name(self):
        return self.value


AIS_FRAGMENT_IDS = frozenset({SentenceID.VDM, SentenceID.VDO})


@dataclass(frozen=True)
class Sentence:
    """A checksum-validated sentence with its decoded fields."""

    sentence_id: SentenceID
    talker: Optional[str]
    fields: Mapping[str, Any]
    raw: str

    def get(self, name, default=None):
        value = self.fields.get(name)
        return default if value is None else value


@dataclass(frozen=True)
class AISFragment(Sentence):
    """One VDM/VDO sentence carrying a slice of an AIS payload."""

    n_fragments: int
    fragment: int
    seq_id: Optional[int]
    channel: Optional[str]
    payload: str
    fill_bits: int


@dataclass(frozen=True)
class AssembledPayload:
    """Concatenated payload of a complete fragment collection."""

    sentence_id: SentenceID
    payload: str
    fill_bits: int
    channel: Optional[str] = None
    n_fragments: int = 1
    lines: tuple = field(default=(), compare=False)
