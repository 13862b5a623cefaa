# coding=utf-8
import re

# Los cinco caracteres reservados de XML y sus entidades con nombre
XML_ESCAPES = {
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "&": "&amp;",
    "'": "&apos;",
}

# Entidades reconocidas al desescapar (con nombre y numéricas)
XML_UNESCAPES = {
    "lt": "<",
    "#60": "<",
    "gt": ">",
    "#62": ">",
    "quot": '"',
    "#34": '"',
    "amp": "&",
    "#38": "&",
    "apos": "'",
    "#39": "'",
}

escape_regex = re.compile(r"""[<>"&']""")
unescape_regex = re.compile(r"&(lt|#60|gt|#62|quot|#34|amp|#38|apos|#39);")


def _escape_char(match):
    char = match.group(0)
    try:
        return XML_ESCAPES[char]
    except KeyError:
        raise ValueError("Unknown special xml character {0}".format(char))


def _unescape_entity(match):
    entity = match.group(1)
    try:
        return XML_UNESCAPES[entity]
    except KeyError:
        raise ValueError("Unknown xml escape character {0}".format(entity))


def escape_xml(text):
    """
    Escapa los cinco caracteres reservados de XML (< > " & ') con sus entidades con nombre.
    El resto de caracteres se dejan tal cual.
    """
    return escape_regex.sub(_escape_char, text)


def unescape_xml(text):
    """
    Sustituye las entidades de los cinco caracteres reservados de XML, tanto en su forma con nombre
    (&lt;) como numérica (&#60;), por el carácter correspondiente. Se hace en una única pasada,
    por lo que "&amp;lt;" queda como "&lt;".
    """
    return unescape_regex.sub(_unescape_entity, text)
