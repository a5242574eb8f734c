"""Screen template: navigable view with a "Go Back" button."""

from typing import List

from rncreate.core.models import FileDescriptor
from rncreate.naming import capitalize_first_letter


def build_screen_files(name: str) -> List[FileDescriptor]:
    """Files for ``src/screens/<name>``."""
    capitalized = capitalize_first_letter(name)
    return [
        FileDescriptor(
            filename=f"{name}Screen.tsx",
            message="Building main screen",
            content=f"""import React from 'react';
import {{ View, Text, Button }} from 'react-native';
import {{ styles }} from './{name}Styles';
import type {{ {name}ScreenProps }} from './{name}Types';

export const {capitalized}Screen: React.FC<{name}ScreenProps> = ({{ navigation }}) => {{
  return (
    <View style={{styles.container}}>
      <Text>{name} Screen</Text>
      <Button title="Go Back" onPress={{() => navigation.goBack()}} />
    </View>
  );
}};
""",
        ),
        FileDescriptor(
            filename=f"{name}Styles.ts",
            message="Creating responsive styles",
            content="""import { StyleSheet } from 'react-native';

export const styles = StyleSheet.create({
  container: {
    flex: 1,
    padding: 16,
    justifyContent: 'center',
    alignItems: 'center',
    // Customize styles here
  },
});
""",
        ),
        FileDescriptor(
            filename=f"{name}Types.ts",
            message="Typing navigation",
            content=f"""import type {{ NativeStackNavigationProp }} from '@react-navigation/native-stack';

export interface {name}ScreenProps {{
  navigation: NativeStackNavigationProp<any, any>;
}}
""",
        ),
        FileDescriptor(
            filename=f"{name}Functions.ts",
            message="Seeding screen helpers",
            content=f"""// Utility functions for {name}Screen (if any)
export function screenHelper() {{
  return 'Helper function for {name}Screen';
}}
""",
        ),
        FileDescriptor(
            filename=f"{name}Screen.test.tsx",
            message="Writing interaction test",
            content=f"""import React from 'react';
import {{ render, fireEvent }} from '@testing-library/react-native';
import {{ {capitalized}Screen }} from './{name}Screen';

const mockNavigation = {{ goBack: jest.fn() }};

describe('{capitalized}Screen', () => {{
  it('renders correctly and calls goBack on button press', () => {{
    const {{ getByText }} = render(<{capitalized}Screen navigation={{mockNavigation as any}} />);
    fireEvent.press(getByText('Go Back'));
    expect(mockNavigation.goBack).toHaveBeenCalled();
  }});
}});
""",
        ),
    ]
