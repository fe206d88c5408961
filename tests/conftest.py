import pytest


def build_pom(entries, indent="    "):
    """Build a minimal pom.xml from (groupId, artifactId[, version]) tuples.

    A None coordinate leaves that element out of the entry.
    """
    lines = ["<?xml version=\"1.0\" encoding=\"UTF-8\"?>", "<project>", "  <modelVersion>4.0.0</modelVersion>", "  <dependencies>"]
    for entry in entries:
        group, artifact = entry[0], entry[1]
        lines.append(f"{indent}<dependency>")
        if group is not None:
            lines.append(f"{indent}  <groupId>{group}</groupId>")
        if artifact is not None:
            lines.append(f"{indent}  <artifactId>{artifact}</artifactId>")
        if len(entry) > 2:
            lines.append(f"{indent}  <version>{entry[2]}</version>")
        lines.append(f"{indent}</dependency>")
    lines += ["  </dependencies>", "</project>", ""]
    return "\n".join(lines)


@pytest.fixture
def make_pom():
    return build_pom
