from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, List, Optional


class CsvOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    delimiter: str = Field(default=',', min_length=1, max_length=1)
    quotechar: str = Field(default='"', min_length=1, max_length=1, alias='quoteChar')
    escapechar: Optional[str] = Field(default='\\', max_length=1, alias='escapeChar')
    # Embedded quote characters are doubled; when False they are prefixed with escapechar instead.
    doublequote: bool = Field(default=True, alias='doubleQuote')
    add_bom: bool = Field(default=False, alias='addBom')
    lineterminator: str = Field(default='\n', alias='lineTerminator')

    @model_validator(mode='after')
    def check_quote_escaping(self) -> 'CsvOptions':
        if not self.doublequote and not self.escapechar:
            raise ValueError("doublequote=False needs an escapechar to escape embedded quote characters")
        return self


class ExcelOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    font_size: float = Field(default=13, gt=0, alias='fontSize')
    sheet_title: Optional[str] = Field(default=None, alias='sheetTitle')


class JsonOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    indent: int = 4
    ensure_ascii: bool = Field(default=False, alias='ensureAscii')


class ExportProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    output_dir: Optional[str] = Field(default=None, alias='outputDir')
    include_index_start: bool = Field(default=False, alias='includeIndexStart')
    include_index_end: bool = Field(default=False, alias='includeIndexEnd')
    header: List[List[Any]] = Field(default_factory=list)
    footer: List[List[Any]] = Field(default_factory=list)
    index_list: List[Any] = Field(default_factory=list, alias='indexList')
    merge_regions: List[str] = Field(default_factory=list, alias='mergeRegions')
    csv: CsvOptions = Field(default_factory=CsvOptions)
    excel: ExcelOptions = Field(default_factory=ExcelOptions)
    json_options: JsonOptions = Field(default_factory=JsonOptions, alias='json')
