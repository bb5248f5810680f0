"""Builders for Javadoc ZIP file contents used across the tests."""

import struct
import zipfile


STRING_XML = """<?xml version="1.0" encoding="UTF-8"?>
<class name="java.lang.String" modifiers="public final"
       extends="java.lang.Object"
       implements="java.io.Serializable java.lang.CharSequence"
       since="1.0" deprecated="false">
  <description>&lt;p&gt;The &lt;code&gt;String&lt;/code&gt; class represents character strings.&lt;/p&gt;</description>
  <constructor modifiers="public">
    <parameter type="char[]" name="value"/>
    <description>Allocates a new &lt;b&gt;String&lt;/b&gt;.</description>
  </constructor>
  <method name="substring" modifiers="public" returns="java.lang.String" since="1.0">
    <parameter type="int" name="beginIndex"/>
    <description>Returns a substring.</description>
  </method>
  <method name="substring" modifiers="public" returns="java.lang.String">
    <parameter type="int" name="beginIndex"/>
    <parameter type="int" name="endIndex"/>
    <description>Returns a bounded substring.</description>
  </method>
  <method name="valueOf" modifiers="public static" returns="java.lang.String" deprecated="true">
    <parameter type="java.lang.Object" name="obj"/>
  </method>
</class>
"""


def class_xml(full_name: str, description: str = "") -> str:
    """Build a minimal class document."""
    return f'<class name="{full_name}" modifiers="public"><description>{description}</description></class>'


def info_xml(**attributes: str) -> str:
    attrs = " ".join(f'{k}="{v}"' for k, v in attributes.items())
    return f"<info {attrs}/>"




def corrupt_entry(path, entry: str) -> None:
    """Damage the compressed data of a deflated entry so it cannot be inflated."""
    with zipfile.ZipFile(path) as zf:
        offset = zf.getinfo(entry).header_offset
    data = bytearray(path.read_bytes())
    name_length, extra_length = struct.unpack("<HH", data[offset + 26:offset + 30])
    start = offset + 30 + name_length + extra_length
    # BTYPE 11 is a reserved deflate block type
    data[start] |= 0x06
    path.write_bytes(bytes(data))
