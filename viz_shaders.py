LINES_VERT = r"""
#version 330 core
layout(location=0) in vec3 inPos;
layout(location=1) in vec3 inColor;
uniform mat4 uMVP;
out vec3 vColor;
void main() {
    gl_Position = uMVP * vec4(inPos, 1.0);
    vColor = inColor;
}
"""

LINES_FRAG = r"""
#version 330 core
in vec3 vColor;
out vec4 FragColor;
uniform float uAlpha;
void main() { FragColor = vec4(vColor, uAlpha); }
"""
