"""Component template: view, styles, types, helpers and a render test."""

from typing import List

from rncreate.core.models import FileDescriptor
from rncreate.naming import capitalize_first_letter


def build_component_files(name: str) -> List[FileDescriptor]:
    """Files for ``src/components/<name>``."""
    capitalized = capitalize_first_letter(name)
    return [
        FileDescriptor(
            filename=f"{name}Component.tsx",
            message="Building main component",
            content=f"""import React from 'react';
import {{ View, Text }} from 'react-native';
import {{ styles }} from './{name}Styles';
import type {{ {name}Props }} from './{name}Types';

export const {capitalized}Component: React.FC<{name}Props> = ({{ title }}) => {{
  return (
    <View style={{styles.container}}>
      <Text>{{title ?? '{capitalized} Component'}}</Text>
    </View>
  );
}};
""",
        ),
        FileDescriptor(
            filename=f"{name}Styles.ts",
            message="Creating base styles",
            content="""import { StyleSheet } from 'react-native';

export const styles = StyleSheet.create({
  container: {
    flex: 1,
    justifyContent: 'center',
    alignItems: 'center',
    // Customize styles here
  },
});
""",
        ),
        FileDescriptor(
            filename=f"{name}Types.ts",
            message="Typing props",
            content=f"""export interface {name}Props {{
  title?: string;
}}
""",
        ),
        FileDescriptor(
            filename=f"{name}Functions.ts",
            message="Adding utility helpers",
            content=f"""// Utility functions for {name}Component (if any)
export function exampleHelper() {{
  return 'Hello from {name}Functions';
}}
""",
        ),
        FileDescriptor(
            filename=f"{name}Component.test.tsx",
            message="Writing render test",
            content=f"""import React from 'react';
import {{ render }} from '@testing-library/react-native';
import {{ {capitalized}Component }} from './{name}Component';

describe('{capitalized}Component', () => {{
  it('renders correctly', () => {{
    const {{ getByText }} = render(<{capitalized}Component title="Test Title" />);
    expect(getByText('Test Title')).toBeTruthy();
  }});
}});
""",
        ),
    ]
