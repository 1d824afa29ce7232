"""Fixed values shared across layers.

Archetype coordinates, Maven discovery names and request defaults.
Nothing here performs I/O.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_VERSION: str = "1.0-SNAPSHOT"
"""Project version used when ``-v`` is not given."""

MAVEN_EXECUTABLE: str = "mvn"
MAVEN_HOME_ENV: str = "M2_HOME"

ARCHETYPE_CACHE_RELATIVE: Path = Path(".m2", "repository", "org", "apache", "maven", "archetypes")
"""Local repository directory, relative to the user's home, holding cached archetypes."""

GENERATE_GOAL: str = "archetype:generate"

# Standard project: full source tree with a sample class and test.
QUICKSTART_ARCHETYPE_GROUP_ID: str = "org.apache.maven.archetypes"
QUICKSTART_ARCHETYPE_ARTIFACT_ID: str = "maven-archetype-quickstart"
QUICKSTART_ARCHETYPE_VERSION: str = "1.4"

# Base POM: a lone pom.xml with packaging "pom".
BASE_POM_ARCHETYPE_GROUP_ID: str = "org.codehaus.mojo.archetypes"
BASE_POM_ARCHETYPE_ARTIFACT_ID: str = "pom-root"
