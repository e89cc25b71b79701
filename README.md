# dicomtk

Small building blocks for working with DICOM data in Python:

- `dicomtk.pn_group` and `dicomtk.personname`: parse and render Person Name (PN)
  values, with control over trailing null separators.
- `dicomtk.vrraw`: the `VR` enumeration of two-letter value representation codes.
- `dicomtk.frame`: native and encapsulated (JPEG) image frames that can be
  turned into Pillow images.
- `dicomtk.dicomio`: a `Reader` that respects nested byte limits and a `Writer`.
  Both follow the byte order of the current transfer syntax.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Person names

```python
from dicomtk.personname import parse

info = parse("Potter^Harry^James^^=^^^^=^^^^")
print(info.alphabetic.family_name)          # Potter
print(info.dcm())                           # Potter^Harry^James^^=^^^^=^^^^
print(info.without_trailing_nulls().dcm())  # Potter^Harry^James
print(info.without_empty_groups().dcm())    # Potter^Harry^James^^
```

`Info` holds three `GroupInfo` values: `alphabetic`, `ideographic` and
`phonetic`. Each `GroupInfo` has `family_name`, `given_name`, `middle_name`,
`name_prefix` and `name_suffix`. Both classes also carry a
`trailing_null_level`, which controls how many empty trailing separators
`dcm()` keeps. `Info.with_format` sets all four levels at once.
`with_trailing_nulls` and `without_trailing_nulls` set them all to the highest
level or to none. A single group string can be parsed with
`dicomtk.pn_group.parse_group`.

Malformed values raise subclasses of `PersonNameError`:

- `GroupCountError` for more than three `=`-separated groups.
- `GroupSegmentCountError` for more than five `^`-separated segments in one group.

`dcm()` raises `NullSepLevelError` when a trailing null level is above its
maximum.

## Value representations

```python
from dicomtk.vrraw import VR

print(VR.PERSON_NAME)   # PN
print(VR("UL").name)    # UNSIGNED_LONG
```

## Frames

```python
from dicomtk.frame import Frame, NativeFrame

native = NativeFrame(data=[[0], [0], [1], [0]], rows=2, cols=2, bits_per_sample=16)
image = native.get_image()   # a 16-bit grayscale Pillow image ("I;16")

frame = Frame(encapsulated=False, native_data=native)
frame.get_native_frame()     # returns native
frame.get_encapsulated_frame()  # raises FrameTypeNotPresentError
```

`NativeFrame.get_image` uses the first sample of each pixel as the gray value
and does not rescale it. `EncapsulatedFrame.get_image` decodes its `data` bytes
as JPEG.

## Binary I/O

```python
import io
from dicomtk.dicomio import ByteOrder, Reader, Writer

buf = io.BytesIO()
writer = Writer(buf, ByteOrder.LITTLE, implicit=False)
writer.write_uint16(0x7FE0)
writer.write_uint32(42)

reader = Reader(io.BytesIO(buf.getvalue()), ByteOrder.LITTLE, limit=6)
print(hex(reader.read_uint16()), reader.read_uint32())  # 0x7fe0 42
```

`Reader.push_limit` and `Reader.pop_limit` bound reads to a nested region.
Popping a limit skips whatever is left of that region. Skipping past the current
limit raises `InsufficientBytesError`.

A few more `Reader` methods:

- `peek` returns upcoming bytes without consuming them.
- `set_coding_system` chooses the codec that `read_string` uses.
- `set_deflate` makes all later reads go through raw deflate decompression.

## What this package does not do

dicomtk does not read or write complete DICOM files or data sets. It has no
tag dictionary, no element model and no command-line tool. It provides only the
pieces listed above.